from bimap.bidirectionalmap import (BidirectionalMap, create_map,
                                    KEYS_FIRST, VALUES_FIRST)
