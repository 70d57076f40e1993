def chi_square(counts, expected):
    # Pearson statistic against a flat expected frequency
    return sum((observed - expected) ** 2 / expected for observed in counts)
