"""Streamlit presentation layer for Gem Slots."""
