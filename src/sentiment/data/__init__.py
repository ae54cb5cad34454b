"""Data layer: conversion between host payloads and domain entities."""

from .errors import DataError, DataValidationError
from .schema import character_from_payload, character_to_payload

__all__ = [
    "DataError",
    "DataValidationError",
    "character_from_payload",
    "character_to_payload",
]
