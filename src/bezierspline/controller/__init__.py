"""
The CONTROLLER layer interprets user input and mutates the model.
"""
