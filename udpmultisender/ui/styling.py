"""
Centralized styling constants for the UDP Multi Sender UI.
"""
import logging

# Log line colors by logging level
LOG_LEVEL_COLORS = {
    logging.DEBUG: "gray",
    logging.INFO: "black",
    logging.WARNING: "#FF9800",  # Orange
    logging.ERROR: "red",
}

# Status bar indicator colors
CONNECTED_COLOR = "green"
DISCONNECTED_COLOR = "gray"
