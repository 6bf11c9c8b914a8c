# backend/__main__.py

from backend.main import run


run()
