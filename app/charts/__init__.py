"""Plotly chart builders."""
