from __future__ import annotations

OK = 0
ERR_USAGE = 2
ERR_PREREQ = 10
ERR_PLATFORM = 11
ERR_VALIDATION = 12
ERR_INTERNAL = 99
