from sys import argv, exit, stderr

from kivy.app import App
from kivy.config import Config
from kivy.logger import Logger
from kivy.metrics import Metrics

from filehandler import read_text
from memoization import Memoization

from widgets.text_view import TextViewWidget

Config.set('kivy', 'exit_on_escape', '0')
Config.set('input', 'mouse', 'mouse,multitouch_on_demand')


class ExampleTextApp(App):

    def __init__(self, filename, text):
        super(ExampleTextApp, self).__init__()

        self.m = Memoization()
        self.filename = filename
        self.text = text

    def build(self):
        self.title = self.filename

        text_view_widget = TextViewWidget(m=self.m, scale=Metrics.density)
        text_view_widget.load_text(self.text)
        Logger.info("Editor: loaded %s (%s paragraphs)" % (
            self.filename, len(text_view_widget.text_view.text_layout_manager.document)))

        text_view_widget.focus = True
        return text_view_widget


def main():
    if len(argv) != 2:
        print("Usage: ", argv[0], "FILENAME")
        exit(2)

    try:
        text = read_text(argv[1])
    except (OSError, UnicodeDecodeError) as e:
        print("Cannot read %s: %s" % (argv[1], e), file=stderr)
        exit(1)

    ExampleTextApp(argv[1], text).run()


if __name__ == "__main__":
    main()
