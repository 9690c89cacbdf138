"""Structured values of NTFS attributes: index root and allocation, file names, standard and volume information, volume names and attribute lists."""