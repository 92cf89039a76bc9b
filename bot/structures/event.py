class Event:

    """
    Base type for every event module under `events/<category>/`.

    `name` is the event the handler listens for. Handlers under the `player`
    category listen on the audio-node bus, all others on the platform bus.
    """

    def __init__(self, context, *, name: str, file: str = ""):
        self.context = context
        self.name = name
        self.file = file


    async def run(self, *args):
        raise NotImplementedError(f"Event '{self.name}' does not implement run()")


    def __repr__(self):
        return f"<Event name={self.name!r} file={self.file!r}>"
