"""
Static data for the front desk: cafe catalog and startup settings.
"""
