"""Streamlit entry point (`streamlit run app.py`) - runs the upload page in app/app.py"""
import runpy
import sys
import os

ROOT = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.join(ROOT, "src"))
runpy.run_path(os.path.join(ROOT, "app", "app.py"), run_name="__main__")
