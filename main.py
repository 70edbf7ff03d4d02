# -*- coding: utf-8 -*-
# Shapetools/main.py

"""
Command line driver:
  1) amalgamate: merge triangles with short edges into polygons (PSLG in, PSLG out)
  2) regions:    export polygons with one region marker per polygon
  3) thin:       keep well separated points from a prioritized .node file

Example:
  python main.py amalgamate 20 100 coast.1 coast.merged
  python main.py regions 0 coast.merged coast.regions --seed 7
  python main.py thin places kept --crs EPSG:3067 --bbox 19,59,32,70 --size 500,800 -d 20
"""

import sys
from mesh.cli import main


if __name__ == "__main__":
    sys.exit(main())
