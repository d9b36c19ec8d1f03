# EV Engine Configuration
# Policy names accepted by get_policy()

POLICY_SIMPLE = "simple"  # Remaining prizes spread over every ticket ever printed
POLICY_ADJUSTED = "adjusted"  # Remaining prizes spread over estimated unsold tickets

# Adjusted is what the scanner has always reported
DEFAULT_POLICY = POLICY_ADJUSTED

# Marker printed in place of a number when EV cannot be computed
UNDEFINED_LABEL = "undefined"
