"""Ambient helpers shared by the library and the command line front end."""
