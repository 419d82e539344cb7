"""Run the API server: ``python -m newstime``."""

from newstime.main import run

if __name__ == "__main__":
    run()
