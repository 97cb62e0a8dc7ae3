"""Record book: the in-memory record collection and its CSV line codec.

Line format (input data lines and %W/%R files):
    <id>,<name>,<YYYY-MM-DD>,<address>,<note>

    1,Alice,2020-01-01,Tokyo,hello, world     # note keeps its commas

Only the first four commas separate fields. Nothing is escaped, so a comma
inside name or address shifts every later field on reload.
"""
