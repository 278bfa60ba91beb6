from pathlib import Path

from argwise.config import loader

parser = loader(Path(__file__).parent / "report.yaml")

if __name__ == "__main__":
    parser.parse()
    parser.display_status()
