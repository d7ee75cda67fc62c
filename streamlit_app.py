"""Streamlit entry point: ``streamlit run streamlit_app.py``."""

from reels_copy.app import main

main()
