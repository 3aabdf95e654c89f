"""
Model Client - fetches Base64 encoded league models over HTTP.
Decoded models are cached in memory per league code.
"""
from model_fetcher.model_client.cache import ModelCache
from model_fetcher.model_client.client import (
    ModelFetcher,
    decode_model_payload,
    get_model_data,
    get_model_fetcher,
)
from model_fetcher.model_client.errors import DecodeFailure, FetchFailure, ModelFetchError

__all__ = [
    "ModelCache",
    "ModelFetcher",
    "ModelFetchError",
    "FetchFailure",
    "DecodeFailure",
    "decode_model_payload",
    "get_model_data",
    "get_model_fetcher",
]
