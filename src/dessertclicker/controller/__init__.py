"""
The CONTROLLER layer connects the Qt event loop to the model.
It owns the session state and tells the views when it changes.
"""
