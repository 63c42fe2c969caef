"""Character, conversion, output, byte-string, string, list, printf and line-reading helpers."""