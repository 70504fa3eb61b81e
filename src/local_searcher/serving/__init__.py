"""
Serving: FastAPI application exposing query embedding and text chunking.
"""
