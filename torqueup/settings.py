# Cards shown under an assistant reply
MAX_RECOMMENDATIONS = 4

# Inventory records embedded in the prompt
PROMPT_INVENTORY_SIZE = 15

# Generation settings for the assistant model
TEMPERATURE = 0.8
TOP_K = 40
TOP_P = 0.95
MAX_OUTPUT_TOKENS = 300
