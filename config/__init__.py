"""
config package: console defaults and console_config.json discovery.
"""
