"""Tests for the serverless entrypoint."""

from fastapi import FastAPI


def test_entrypoint_exposes_app() -> None:
    from api.index import app

    assert isinstance(app, FastAPI)
