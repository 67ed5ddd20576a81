"""
onedata.api.routers

Router modules for the dashboard API.
"""

# Package marker.
