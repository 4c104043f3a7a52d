# Package Global Variables
# This module serves as a way to share settings across the package's
# outer layers (JSON bridge and CLI). The core calculations read nothing
# from here.

# Flag that indicates to run in Debug mode or not. When running in Debug mode
# log messages are also echoed to the console. Generally, it's useful to set
# this to True while developing and False when distributing.
DEBUG = False

PACKAGE_NAME = 'pythagoras'

# Logger used by lib.triangle_utils.log
LOGGER_NAME = PACKAGE_NAME

# Key order used when serializing records to JSON
FIELD_NAMES = ('radians', 'rise', 'run', 'diagonal')

# Indentation for JSON output (None writes a single line)
DEFAULT_JSON_INDENT = None
