from alphawebm.utils.path_utils import escape_file_arg, format_command


def test_windows_wraps_in_quotes():
    assert escape_file_arg(r"C:\clips\my clip.mov", platform="win32") == r'"C:\clips\my clip.mov"'


def test_posix_escapes_spaces():
    assert escape_file_arg("/clips/my clip.mov", platform="linux") == "/clips/my\\ clip.mov"
    assert escape_file_arg("/clips/plain.mov", platform="darwin") == "/clips/plain.mov"


def test_format_command_only_escapes_arguments_with_spaces():
    cmd = ["mkclean", "--doctype", "4", "/v/a b.mov.webm"]
    assert format_command(cmd, platform="linux") == "mkclean --doctype 4 /v/a\\ b.mov.webm"
    assert format_command(cmd, platform="win32") == 'mkclean --doctype 4 "/v/a b.mov.webm"'
