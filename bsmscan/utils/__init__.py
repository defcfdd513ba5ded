from bsmscan.utils.mixing import mix_mat_3d, mix_mat_angles_3d, mix_mat_normal_form_3d, ordered_mix_mat_3d

__all__ = ["mix_mat_3d", "mix_mat_angles_3d", "mix_mat_normal_form_3d", "ordered_mix_mat_3d"]
