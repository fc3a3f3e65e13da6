"""sgpkit Catalog — print the current position of every satellite in a TLE file.

Usage: python catalog_positions.py stations.txt
"""

import sys
from datetime import datetime, timezone

from sgpkit import PropagationError, compute_state, load_catalog

now = datetime.now(timezone.utc)

for tle in load_catalog(sys.argv[1]):
    try:
        state = compute_state(tle, now)
    except PropagationError as e:
        print(f"{tle.title:<24} {e}")
        continue
    print(f"{tle.title:<24} {state.latitude:8.3f} {state.longitude:9.3f} {state.altitude:9.1f} km")
