"""Tests for job file loading."""

import pytest

from ffcmd.jobs import Job, JobFileError, load_job, load_job_from_dict
from ffcmd.options import Number, StreamSpecifier

FULL_JOB = """\
global:
  overwrite: true
  log: {level: error, repeated: true, color: false}
inputs:
  - path: in.mkv
    decoding:
      hardware_acceleration: cuda
      hardware_acceleration_device: 0
      codec: {value: h264_cuvid, stream: {type: v}}
complex_filter:
  output_num: 2
  chains:
    - inputs: [out1]
      filters: ["scale=640:360"]
      outputs: [small]
outputs:
  - path: big.mp4
    map: ["[out0]", {input_file_id: 0, stream: {type: a}}]
    encoding:
      bitrate: [{value: 2M, stream: {type: v}}]
      buf_size: 4M
      codec: [libx264]
      crf: 23
      preset: fast
      filters: [{sar: {antecedent: 1, consequent: 1}}]
      customize: {threads: 4}
  - path: small.ts
    format: mpegts
    map: ["[small]"]
    encoding:
      maxrate: [800k, 1.5M]
      remove_audio: true
"""


class TestLoadJob:
    def test_full_job(self, write_job):
        job = load_job(write_job(FULL_JOB))

        assert isinstance(job, Job)
        assert job.global_options.overwrite is True
        assert job.global_options.environment() == {"AV_LOG_FORCE_NOCOLOR": "1"}
        assert job.inputs[0].options.decoding.codec.stream == StreamSpecifier(type="v")
        assert job.complex_filter.output_num == 2
        assert job.complex_filter.complex_filters[0].input_streams == (
            StreamSpecifier(name="out1"),
        )

        encoding = job.outputs[0].options.encoding
        assert encoding.bitrate[0].value == Number(2.0, "M")
        assert encoding.buf_size == Number(4.0, "M")
        assert encoding.customize == (("threads", 4),)

    def test_full_job_args(self, write_job):
        args = load_job(write_job(FULL_JOB)).build_args()
        assert args == [
            "-hide_banner", "-loglevel", "repeat+error", "-y",
            "-hwaccel", "cuda", "-hwaccel_device", "0", "-c:v", "h264_cuvid",
            "-i", "in.mkv",
            "-filter_complex", "split=2[out0][out1],[out1]scale=640:360[small]",
            "-map", "[out0]", "-map", "0:a",
            "-b:v", "2M", "-bufsize", "4M", "-codec", "libx264", "-crf", "23",
            "-filter", "setsar=1/1", "-preset", "fast", "-threads", "4",
            "-y", "big.mp4",
            "-map", "[small]",
            "-maxrate", "800k", "-maxrate", "1.5M", "-an",
            "-f", "mpegts", "-y", "small.ts",
        ]  # fmt: skip

    def test_json_job(self, write_job):
        path = write_job(
            '{"inputs": [{"path": "in.mkv"}], "outputs": [{"path": "out.mp4"}]}',
            name="job.json",
        )
        assert load_job(path).build_args() == [
            "-hide_banner", "-i", "in.mkv", "-y", "out.mp4",
        ]  # fmt: skip

    def test_missing_file(self, temp_dir):
        with pytest.raises(JobFileError, match="Cannot read job file"):
            load_job(temp_dir / "missing.yaml")

    def test_undecodable_file(self, temp_dir):
        path = temp_dir / "job.yaml"
        path.write_bytes(b"outputs:\n  - path: \xff\xfe\n")
        with pytest.raises(JobFileError, match="Cannot read job file"):
            load_job(path)

    def test_invalid_yaml(self, write_job):
        with pytest.raises(JobFileError, match="Invalid YAML"):
            load_job(write_job("outputs: [\n"))

    def test_empty_file(self, write_job):
        with pytest.raises(JobFileError, match="must contain a mapping"):
            load_job(write_job(""))


class TestValidation:
    def test_outputs_required(self):
        with pytest.raises(JobFileError) as exc_info:
            load_job_from_dict({"inputs": [{"path": "in.mkv"}]})
        assert exc_info.value.field == "outputs"

    def test_unknown_field(self):
        with pytest.raises(JobFileError, match="Invalid job"):
            load_job_from_dict({"outputs": [{"path": "o", "codec": "x"}]})

    def test_bad_number_shorthand(self):
        with pytest.raises(JobFileError) as exc_info:
            load_job_from_dict(
                {"outputs": [{"path": "o", "encoding": {"bitrate": ["2Q"]}}]}
            )
        assert "invalid unit prefix" in str(exc_info.value)
        assert exc_info.value.field.startswith("outputs.0.encoding.bitrate")

    def test_bad_log_level(self):
        with pytest.raises(JobFileError, match="Invalid log level"):
            load_job_from_dict(
                {"global": {"log": {"level": "loud"}}, "outputs": [{"path": "o"}]}
            )

    def test_customize_rejects_bool(self):
        with pytest.raises(JobFileError):
            load_job_from_dict(
                {"outputs": [{"path": "o", "encoding": {"customize": {"an": True}}}]}
            )

    def test_bad_chain_separator(self):
        with pytest.raises(JobFileError):
            load_job_from_dict(
                {"complex_filter": {"chain_separator": "|"}, "outputs": [{"path": "o"}]}
            )

    def test_global_options_by_name(self):
        job = load_job_from_dict(
            {"global_options": {"hide_banner": False}, "outputs": [{"path": "o"}]}
        )
        assert job.build_args() == ["-y", "o"]

    def test_numeric_bitrate(self):
        job = load_job_from_dict(
            {"outputs": [{"path": "o", "encoding": {"bitrate": [500000]}}]}
        )
        assert job.build_args()[1:3] == ["-b", "500000"]
