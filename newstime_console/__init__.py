"""Newstime Console - admin client for the 24x7 News Time API.

Holds the admin token between runs, verifies it against the server on
start-up and gates admin commands on the result.

Usage:
    newstime-admin configure --server https://api.example.com
    newstime-admin login
    newstime-admin status
    newstime-admin go-live VIDEO_ID --title "Evening bulletin"
    newstime-admin logout
"""

__version__ = "1.0.0"
