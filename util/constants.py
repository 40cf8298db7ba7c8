class InternalURIs:
    API = "/api"
    V1 = API + "/v1"
    INJECT_CONTEXT = V1 + "/inject-context"
    SEARCH = V1 + "/search"
    KNOWLEDGE_STATUS = V1 + "/knowledge/status"


# Fuzzy matches must score strictly above this to count.
FUZZY_MATCH_THRESHOLD = 0.3
DEFAULT_TOP_K = 3
USER_ROLE = "user"
