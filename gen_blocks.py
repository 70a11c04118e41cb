import pandas as pd
import numpy as np

# Number of blocks
num_blocks = 40

np.random.seed(42)

# Block sizes in surface units (px)
widths = np.random.randint(10, 80, num_blocks)
heights = np.random.randint(10, 80, num_blocks)

# Build DataFrame; row order is the input order, index is the block identity
df = pd.DataFrame({
    "index": np.arange(num_blocks),
    "width": widths,
    "height": heights,
})

df.to_csv("random_blocks_40.csv", index=False)

print("File created: random_blocks_40.csv")
print(df.head(10))
