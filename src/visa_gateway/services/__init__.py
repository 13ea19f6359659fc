"""
visa_gateway.services

Service layer package.
"""

# Package marker.
