import sys

def get_tqdm():
    """
    Return a tqdm appropriate for the situation

    This replaces `import tqdm`, so for example, you do this:
      from annotext.utils.get_tqdm import get_tqdm
      tqdm = get_tqdm()
    then do this when you want a progress bar or regular iterator depending on context:
      tqdm(list)

    If there is no tty, the returned tqdm will always be disabled
    unless disable=False is specifically set.
    """
    from tqdm import tqdm
    if sys.stderr is not None and sys.stderr.isatty():
        return tqdm

    def hidden_tqdm(*args, **kwargs):
        if "disable" in kwargs:
            return tqdm(*args, **kwargs)
        kwargs["disable"] = True
        return tqdm(*args, **kwargs)

    return hidden_tqdm
