# main.py
from campus_nav.cli import main

if __name__ == "__main__":
    # e.g. python main.py --dataset data/campus_nodes_edges.json route "Main Gate" Library
    raise SystemExit(main())
