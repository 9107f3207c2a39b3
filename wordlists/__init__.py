"""Word lists shipped with the project"""
