"""
visa_gateway.api.routers

HTTP routers mounted by `visa_gateway.api.app.create_app`.
"""

# Package marker.
