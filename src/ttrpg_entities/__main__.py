import sys

from ttrpg_entities.cli import main


sys.exit(main())
