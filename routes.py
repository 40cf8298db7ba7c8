# routes.py
from fastapi import FastAPI
from controller.context_controller import context_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(context_router)
