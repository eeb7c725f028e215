"""Time unit constants."""

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * 60
HOURS_PER_DAY = 24

# Adobe Premiere Pro divides every second into this many ticks regardless of rate.
PREMIERE_TICKS_PER_SECOND = 254_016_000_000
