"""Run the hour picker demo: python -m hourpicker"""
import sys

from hourpicker.app.main import main

if __name__ == "__main__":
    sys.exit(main())
