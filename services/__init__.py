"""
Terminal collaborators for the game loop: clock, keyboard and display.
"""
