"""Print a greeting; called as `greet.py name="World" [shout="true"]`."""
import sys


def read_flags(argv):
    flags = {}
    for arg in argv:
        key, _, value = arg.partition('=')
        flags[key] = value.strip('"')
    return flags


flags = read_flags(sys.argv[1:])
text = f"Hello, {flags.get('name', 'nobody')}!"
if flags.get('shout') == 'true':
    text = text.upper()
sys.stdout.write(f'<p>{text}</p>')
