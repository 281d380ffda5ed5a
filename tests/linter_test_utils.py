import astroid  # type: ignore[import-untyped]


class MockLinter:
    def __init__(self) -> None:
        self.messages = []
        self.calls = []
        self.config = type("config", (), {})()
        self.current_name = "test_module"

    def add_message(self, msg_id, *args, **kwargs):
        self.messages.append(msg_id)
        self.calls.append((msg_id, args, kwargs))

    def _register_options_provider(self, provider):
        pass


def run_checker(checker_cls, code, filename="test.py", module_name="", **checker_kwargs) -> list:
    linter = MockLinter()
    checker = checker_cls(linter, **checker_kwargs)
    checker.open()
    tree = astroid.parse(code, module_name=module_name)
    tree.file = filename

    def _walk(node):
        node_name = node.__class__.__name__.lower()

        if hasattr(checker, f"visit_{node_name}"):
            getattr(checker, f"visit_{node_name}")(node)

        for child in node.get_children():
            _walk(child)

        if hasattr(checker, f"leave_{node_name}"):
            getattr(checker, f"leave_{node_name}")(node)

    _walk(tree)
    return linter.messages
