# NJ Lottery Provider Configuration
# Endpoint and request defaults for the instant-games listing API

BASE_URL = "https://www.njlottery.com/api/v1/instant-games/games/"
PAGE_SIZE = 1000  # Large enough to get the whole catalog in one page

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_13_1) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/62.0.3202.94 Safari/537.36"
)

DEFAULT_HEADERS = {
    "accept": "application/json",
    "user-agent": USER_AGENT,
}

REQUEST_TIMEOUT = 10  # seconds
