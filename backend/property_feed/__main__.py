import sys

from property_feed.main import main

sys.exit(main())
