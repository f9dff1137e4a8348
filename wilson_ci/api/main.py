"""ASGI application object for uvicorn or any other ASGI host.

Run with `uvicorn wilson_ci.api.main:app`.
"""

from fastapi import FastAPI

from wilson_ci.api.server import app as interval_api

app: FastAPI = interval_api
