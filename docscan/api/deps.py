from fastapi import Request

from ..core.config import Settings
from ..services.inference_base import InferenceBackend


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_inference_backend(request: Request) -> InferenceBackend:
    return request.app.state.inference_backend
