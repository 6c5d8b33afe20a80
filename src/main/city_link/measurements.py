SEARCH_VISIT_COUNT = "search_visit_count"
SEARCH_BACKTRACK_COUNT = "search_backtrack_count"
SEARCH_SECONDS_SUM = "search_seconds_sum"
CLOSURE_ROUND_COUNT = "closure_round_count"
CLOSURE_DIRECT_EDGE_COUNT = "closure_direct_edge_count"
CLOSURE_DERIVED_EDGE_COUNT = "closure_derived_edge_count"
CLOSURE_SECONDS_SUM = "closure_seconds_sum"
