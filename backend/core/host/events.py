"""Event names routed by the algo host."""

# Inbound data
EVENT_CANDLES = "data:managed:candles"

# Instance lifecycle
EVENT_LIFE_START = "life:start"
EVENT_LIFE_STOP = "life:stop"

# Bus (execution) events
EVENT_SUBMIT_ALL = "exec:order:submit:all"
EVENT_STOP = "exec:stop"
