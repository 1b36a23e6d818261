"""
ppm_blur.utils
--------------
Optional helpers around the core pipeline: PSNR metric and a before/after
preview figure. Neither affects the output image.
"""
