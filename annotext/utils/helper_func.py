def make_table(header, content, column_width=None):
    '''
    Input:
    header -> List[str]: table header
    content -> List[List[str]]: table content
    column_width -> int: table column width; set to None for dynamically calculated widths

    Output:
    table_str -> str: well-formatted string for the table
    '''
    if column_width is None:
        lens = [[len(str(h)) for h in header]]
        lens += [[len(str(x)) for x in row] for row in content]
        column_widths = [max(c) + 3 for c in zip(*lens)]
    else:
        column_widths = [column_width] * len(header)
    total_width = sum(column_widths) + 1

    def format_row(row):
        return '|' + ''.join(' ' + str(item).ljust(column_widths[i] - 2) + '|' for i, item in enumerate(row)) + '\n'

    table_str = '=' * total_width + '\n'
    table_str += format_row(header)
    table_str += '-' * total_width + '\n'
    for line in content:
        table_str += format_row(line)
    table_str += '=' * total_width + '\n'
    return table_str

def split_names(names):
    """
    Turn "tokenize, pos" or ["tokenize", "pos"] into a list of stripped, lowercased names

    None stays None so callers can tell "not given" from "empty"
    """
    if names is None:
        return None
    if isinstance(names, str):
        names = names.split(',')
    return [name.strip().lower() for name in names if name.strip()]
