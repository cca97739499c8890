# Two standard deviations closer than this are treated as tied
STDDEV_EPSILON = 1e-4

# Final tie-break direction for equal scores (True = lowest id wins)
DISH_ID_TIE_BREAK_ASCENDING = True
PLAYER_ID_TIE_BREAK_ASCENDING = True

# Rank position that counts as a "favourite" vote for polarization
TOP_RANK = 1
