#!/usr/bin/env python3
#
# TagTerm
# Copyright (c) 2025 Martynas Jocius
#
"""Built-in configuration, layered under the user's config file."""

DEFAULT_CONFIG = {
    "theme": {
        "basic": "grey70",
        "window_border": "blue",
        "window_title": "bold bright_red",
        "active_border": "grey70",
        "list_highlighted": "bold bright_green on grey23",
        "list_active": "bold bright_yellow on grey23",
        "list_directory": "bright_blue",
        "list_parent": "bright_yellow",
        "list_selected": "bright_green",
        "popup_border": "bright_yellow",
        "popup_field": "bold black on bright_red",
        "tab_active": "bold black on bright_cyan",
        "tab_inactive": "cyan",
        "log_error": "red",
        "log_warn": "yellow",
        "log_info": "blue",
        "log_debug": "grey50",
    },
    "actions": {
        # General
        "up": "Up",
        "down": "Down",
        "quit": "q",
        "back": "Esc",
        "switch_focus": "Tab",
        "toggle_logs": "l",
        "logs_prev": "PageUp",
        "logs_next": "PageDown",
        "screen_one": "1",
        "screen_two": "2",
        "screen_three": "3",
        "help": "h",
        # Main screen
        "remove_files": "c",
        "write_tags": "w",
        "select_current": "s",
        "select_all": "a",
        "remove": "d",
        "spawn_popup": "Enter",
        "update_names": "u",
        "template_popup": "t",
        # Files screen
        "add_file": "s",
        "add_all_files": "a",
        "parent_directory": "b",
        "enter_directory": "Enter",
        "show_hidden": "t",
        # Frames screen
        "add_frame": "a",
        # Popups
        "select_field": "Enter",
        "save_changes": "w",
    },
}
