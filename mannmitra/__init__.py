"""MannMitra: a mental-wellness companion built on Streamlit and Supabase."""

__version__ = "0.1.0"
