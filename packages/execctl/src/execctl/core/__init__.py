"""Process execution core: command checks, subprocess runs, host detection."""
