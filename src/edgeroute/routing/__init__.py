"""Routing — ordered route table with first-match-wins resolution.

Routes are registered during setup and resolved by a linear scan in
registration order.
"""
