import re

UNKNOWN = 'Unknown'

_DURATION_PATTERN = re.compile(r'PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+(?:\.\d+)?)S)?')


def format_duration(duration: str | None) -> str:
	"""Turn an ISO-8601 time duration into a short delivery label.

	'PT20H8M16.305111S' -> '20h 8m', 'PT48H' -> '2 days', 'PT45M' -> '45m'.
	Seconds are accepted but dropped. Anything unparseable gives 'Unknown'.
	"""
	if not duration:
		return UNKNOWN

	match = _DURATION_PATTERN.match(duration)
	if match is None:
		return UNKNOWN

	hours = int(match.group(1)) if match.group(1) else 0
	minutes = int(match.group(2)) if match.group(2) else 0

	# strictly more than a day; exactly 24h stays in hours
	if hours > 24:
		days = hours // 24
		return f'{days} day{"s" if days > 1 else ""}'
	if hours > 0:
		return f'{hours}h {minutes}m' if minutes > 0 else f'{hours}h'
	return f'{minutes}m'
