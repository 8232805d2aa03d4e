"""
Ambient utilities: exceptions, logging and configuration.
"""
