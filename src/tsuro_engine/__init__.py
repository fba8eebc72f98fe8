"""Tsuro-style tile placement and stone movement engine."""
