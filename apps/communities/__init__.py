"""Communities app package.

A community is the tenant boundary of ParkBoard: users and parking slots
belong to exactly one community and data never crosses it. The
`tenancy` module resolves the caller's community for every request.
"""
