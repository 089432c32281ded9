"""
Falling Rocks - dodge falling rocks, collect coins, stars and gems.
"""
