BEAUFORT_MIN = 0
BEAUFORT_MAX = 12

DESCRIPTIONS = (
  "Calm", "Light air", "Light breeze", "Gentle breeze", "Moderate breeze",
  "Fresh breeze", "Strong breeze", "High wind", "Gale", "Strong gale",
  "Storm", "Violent storm", "Hurricane",
)


def clamp_beaufort(force: int) -> int:
  return min(BEAUFORT_MAX, max(BEAUFORT_MIN, int(force)))


def describe_wind(force: int) -> str:
  if not BEAUFORT_MIN <= force <= BEAUFORT_MAX:
    return "Unknown"
  return DESCRIPTIONS[force]
