"""Tests for the task tracker service."""
