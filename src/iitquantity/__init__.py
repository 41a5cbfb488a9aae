"""
IIT Quantity
============
A static explanatory screen on the first problem of Information Integration
Theory: the quantity of consciousness and its measure, Phi.
"""
__version__ = "0.1.0"
