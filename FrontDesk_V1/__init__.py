"""
FrontDesk package

Console simulator for a small hospital front desk: bed capacity for one
ward, patient registration against that capacity, and a cafe counter that
sums orders into a bill.  Domain objects, static data, service flows and
console display helpers live in separate subpackages.
"""

__all__ = ["core", "domain", "data", "ui"]
