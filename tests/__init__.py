"""Test suite for the generative UI service."""
