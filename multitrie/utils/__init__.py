# multitrie/utils - config, logging, metrics, pair files and the Hangul decomposer
