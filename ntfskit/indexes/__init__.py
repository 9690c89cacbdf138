"""Index entry types: the IndexEntryType base class and FileNameIndex for directories."""