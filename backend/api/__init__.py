"""
Guidepost API package.

The FastAPI application lives in api.app; import it from there
(``uvicorn api.app:app``) so feature modules can import API helpers
without pulling in the whole application.
"""
