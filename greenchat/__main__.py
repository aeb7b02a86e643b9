import sys
from pathlib import Path

from streamlit.web import cli as stcli


def main():
    """Launch the Streamlit app: ``python -m greenchat``."""
    app = Path(__file__).resolve().parent / "app.py"
    sys.argv = ["streamlit", "run", str(app), *sys.argv[1:]]
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
