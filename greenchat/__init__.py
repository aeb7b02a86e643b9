"""Streamlit front end for the GreenChat messaging service."""

__version__ = "0.1.0"
