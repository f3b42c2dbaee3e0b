from oas2json.generator.names import (
    flatten_path,
    format_file_name,
    get_filename,
    path_folder,
    sanitize_filename,
    strip_uri_chars,
)


class TestSanitizeFilename:
    def test_plain_name_unchanged(self):
        assert sanitize_filename("Pet") == "Pet"

    def test_reserved_chars_replaced(self):
        assert sanitize_filename('a<b>c:"d', replacement="-") == "a-b-c-d"

    def test_repeated_replacement_collapsed(self):
        assert sanitize_filename("a//b", replacement="-") == "a-b"

    def test_dots_only(self):
        assert sanitize_filename("..", replacement="-") == "-"

    def test_windows_device_name(self):
        assert sanitize_filename("CON", replacement="-") == "CON-"

    def test_truncated(self):
        assert len(sanitize_filename("x" * 300)) == 100


class TestFormatFileName:
    def test_whitespace_to_underscore(self):
        assert format_file_name("Example  Pet") == "Example_Pet"

    def test_trailing_dot_removed(self):
        assert format_file_name("name.") == "name"


class TestGetFilename:
    def test_component_name(self):
        assert get_filename("Pet") == "Pet"

    def test_leading_separator_stripped(self):
        assert get_filename("/leading") == "leading"

    def test_space_in_name(self):
        assert get_filename("Example Pet") == "Example_Pet"

    def test_distinct_inputs_stay_distinct(self):
        assert get_filename("Pet.v1") != get_filename("Pet.v2")

    def test_nothing_usable(self):
        assert get_filename("..") == ""

    def test_deterministic(self):
        assert get_filename("a/b c") == get_filename("a/b c")


class TestPathNames:
    def test_strip_uri_chars(self):
        assert strip_uri_chars("/widgets/{id} x") == "/widgets/idx"

    def test_path_folder(self):
        assert path_folder("/widgets/{id}") == "widgets/id"

    def test_flatten_path(self):
        assert flatten_path("/widgets/{id}") == "_widgets_id"

    def test_root_path(self):
        assert path_folder("/") == ""
        assert flatten_path("/") == "_"
