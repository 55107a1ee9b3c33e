#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#

__version__ = "0.3"
__author__ = "Martynas Jocius"
__license__ = "MIT"

VERSION = __version__

SCREEN_MAIN = "Main"
SCREEN_FILES = "Files"
SCREEN_FRAMES = "Frames"

TICK_INTERVAL = 0.2
LOG_BUFFER_SIZE = 500
LOG_PANEL_HEIGHT = 10

DEBUG_HISTORY_SIZE = 200

UI_APP_NAME = "TagTerm"
UI_PANEL_ENTRIES = "Files"
UI_PANEL_DETAILS = "Details"
UI_PANEL_BROWSER = "Browser"
UI_PANEL_FRAMES = "Frames"
UI_PANEL_LOGS = "Logs"
UI_NO_ENTRIES = "No files loaded"
UI_NO_DETAILS = "No file highlighted"
UI_PARENT_ROW = "../"
