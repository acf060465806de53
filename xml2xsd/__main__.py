"""Erlaubt `python -m xml2xsd`."""

import sys

from xml2xsd.main import main

sys.exit(main())
