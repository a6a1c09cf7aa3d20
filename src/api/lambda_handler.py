# src/api/lambda_handler.py
"""
AWS Lambda handler for FastAPI using Mangum (ASGI adapter).

How it works:
- API Gateway invokes Lambda
- Mangum translates the event into an ASGI request
- FastAPI handles routing (/health, /options, /coverage/{level}, /estimate)
- Response is returned back to API Gateway

The rate tables are module constants, so there is nothing to warm up at cold start.
"""

from __future__ import annotations

from mangum import Mangum

from src.api.app import app
from src.utils.config import configure_logging

configure_logging()

# Mangum handler
handler = Mangum(app, lifespan="off")
