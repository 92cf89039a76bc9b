"""
Discord side of the bot: lifecycle, handler loading, command registry,
event routing and slash-command publishing.
"""
