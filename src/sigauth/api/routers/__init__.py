"""
sigauth.api.routers

HTTP routers (health probes, signature verification).
"""
