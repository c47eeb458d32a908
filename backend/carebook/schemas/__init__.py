"""Pydantic schemas for patients, providers, appointments and shared responses."""
