# perceptual_hash

This package computes perceptual hashes of images and the Hamming distance
between them. Images that look alike produce hashes that are close together.
This holds even when the images differ in resolution, aspect ratio, brightness
or small edits.

Images are handled as Pillow `Image` objects. The numeric work is done with
NumPy.

## Installation

```
pip install perceptual_hash
```

## Quick start

```python
from PIL import Image

from perceptual_hash.hasher import HasherConfig

hasher = HasherConfig().to_hasher()

hash1 = hasher.hash_image(Image.open("image1.png"))
hash2 = hasher.hash_image(Image.open("image2.png"))

print("Image1 hash:", hash1.to_base64())
print("Image2 hash:", hash2.to_base64())
print("Hamming distance:", hash1.dist(hash2))
```

## Configuration

`perceptual_hash.hasher.HasherConfig` is an immutable builder. Each setter
returns a new config. Call `to_hasher()` on a config to get a `Hasher`, then
call `hash_image(image)` on the hasher.

```python
from perceptual_hash.algorithms import HashAlg
from perceptual_hash.hasher import HasherConfig
from perceptual_hash.images import FilterType

hasher = (
    HasherConfig()
    .hash_size(16, 16)
    .hash_alg(HashAlg.MEAN)
    .resize_filter(FilterType.TRIANGLE)
    .preproc_dct()
    .to_hasher()
)
```

| Setter | Default |
| --- | --- |
| `hash_size(width, height)` | 8 x 8 bits |
| `hash_alg(algorithm)` | `HashAlg.GRADIENT` |
| `resize_filter(filter_type)` | `FilterType.LANCZOS3` |
| `preproc_dct()` | off |
| `preproc_diff_gauss()` / `preproc_diff_gauss_sigmas(a, b)` | off |

By default a hash may be any size. `HasherConfig(max_bytes=8)` fixes its
capacity at 8 bytes instead. With a fixed capacity, `to_hasher()` raises
`ValueError` if the hash size, after rounding, needs more bits than the
capacity holds. Each hash it produces is zero-filled to `max_bytes`.

### Algorithms (`perceptual_hash.algorithms.HashAlg`)

- `MEAN`: scales the image to `width x height` and sets a bit for each pixel
  that is at least the mean.
- `GRADIENT`: scales the image to `(width + 1) x height` and sets a bit where a
  pixel is brighter than its left neighbour.
- `VERT_GRADIENT`: scales the image to `width x (height + 1)` and sets a bit
  where a pixel is brighter than the pixel above it.
- `DOUBLE_GRADIENT`: scales the image to `(width / 2 + 1) x (height / 2 + 1)`
  and produces the row bits followed by the column bits. The hash size is
  rounded up to a multiple of 2.
- `BLOCKHASH`: the blockhash.io algorithm. It works on the unscaled image, and
  the hash size is rounded up to a multiple of 4.

Apart from `BLOCKHASH`, every algorithm converts the image to 8-bit grayscale
before scaling it.

### Resize filters (`perceptual_hash.images.FilterType`)

The filters are `NEAREST`, `TRIANGLE`, `CATMULL_ROM`, `GAUSSIAN` and
`LANCZOS3`. `FilterType.resampling()` gives the Pillow filter each one maps
to: nearest, bilinear, bicubic, Hamming and Lanczos respectively. Pillow has
no Gaussian resampler, so `GAUSSIAN` uses the Hamming window.

### Preprocessing

- `preproc_dct()` scales the image to twice the resize dimensions and applies a
  2D type-II discrete cosine transform. The algorithm then hashes the
  low-frequency quarter of the result. `MEAN` combined with the DCT is the
  classic "pHash". `BLOCKHASH` ignores this option.
- `preproc_diff_gauss()` and `preproc_diff_gauss_sigmas(a, b)` blur the image
  twice and subtract one blur from the other, channel by channel, wrapping
  around at 256. What remains is mostly the image's edges. The default sigmas
  are 5.0 and 10.0. This is mainly useful with `BLOCKHASH`.

## Hashes (`perceptual_hash.imagehash`)

An `ImageHash` is a frozen dataclass that holds the packed bits in `data`. The
bits are stored least significant bit first.

- `as_bytes()`: returns the raw hash bytes.
- `to_base64()`: returns the bytes as standard padded Base64.
- `ImageHash.from_bytes(data, max_bytes=None)`: builds a hash from raw bytes.
- `ImageHash.from_base64(encoded, max_bytes=None)`: builds a hash from a
  Base64 string.
- `dist(other)`: returns the Hamming distance. It only has meaning between
  hashes of the same size and algorithm.

`InvalidBytesError` is a subclass of `ValueError`. It is raised in two cases:

- The input is not valid Base64.
- The data is longer than `max_bytes`. In this case `expected` and `found`
  give the two lengths.

## Lower-level helpers

- `perceptual_hash.bits`: provides `bools_to_bytes`, `packed_length` and
  `hamming`.
- `perceptual_hash.dct`: provides `DctContext` and `crop_2d_dct`.
- `perceptual_hash.blockhash`: provides `blockhash(image, width, height)`,
  `sum_px`, `get_median` and `qselect`.
- `perceptual_hash.images`: provides `to_grayscale`, `blur`, `diff_images` and
  `iter_pixels8`.

## Command line

```
hash-image picture.png
```

This prints the path and the image's default hash, an 8 x 8 gradient hash, in
hexadecimal:

```
picture.png: 3c7e7e3c1c0c0e06
```

If the file cannot be opened, the command prints an error to standard error
and exits with status 1.

## What it does not do

The command always uses the default settings and takes exactly one image. To
choose an algorithm, change the size, apply preprocessing or compare several
images, use the library. The package does not store hashes and does not search
collections of them.