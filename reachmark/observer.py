class MarkerObserver:

    def __init__(self, marker):

        self.marker = marker
        marker.register_observer(self)

    def on_step(self, marker, result):
        pass

    def on_done(self, marker):
        pass

    def on_error(self, marker, node, exception):
        pass


class MarkerObservee:

    def __init__(self):
        self.observers = []

    def register_observer(self, observer):
        self.observers.append(observer)

    def unregister_observer(self, observer):
        self.observers.remove(observer)

    def notify_step(self, result):
        for observer in self.observers:
            observer.on_step(self, result)

    def notify_done(self):
        for observer in self.observers:
            observer.on_done(self)

    def notify_error(self, node, exception):
        for observer in self.observers:
            observer.on_error(self, node, exception)
