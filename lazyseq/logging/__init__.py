from rich import print


class log:
    @classmethod
    def info(cls, msg):
        print(msg)

    @classmethod
    def warning(cls, msg):
        print(f'[yellow]{msg}[/yellow]')
