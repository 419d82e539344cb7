"""24x7 News Time - REST backend for the news portal.

Serves posts, categories, YouTube video references and the live-stream
status to the public site, and gates every write behind a signed admin
token issued by ``/api/auth/login``.
"""

__version__ = "1.0.0"
