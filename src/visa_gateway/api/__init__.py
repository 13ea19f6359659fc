"""
visa_gateway.api

API package for the visa eligibility gateway.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: body parsing + delegation to the eligibility service.
