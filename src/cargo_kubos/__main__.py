"""python -m cargo_kubos"""

from cargo_kubos.cli.main import main

if __name__ == "__main__":
    main()
