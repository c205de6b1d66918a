""" Bot profile configuration modules, one per supported machine. """
