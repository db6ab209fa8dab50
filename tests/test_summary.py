from hdfskit.summary import ContentSummary, ServerDefaults


def test_content_summary_fields():
    cs = ContentSummary.from_response(
        "/_test/foo.txt",
        {
            "length": 4,
            "spaceConsumed": 12,
            "fileCount": 1,
            "directoryCount": 0,
            "quota": -1,
            "spaceQuota": -1,
        },
    )
    assert cs.name == "/_test/foo.txt"
    assert cs.size == 4
    assert cs.size_after_replication == 12
    assert cs.file_count == 1
    assert cs.directory_count == 0
    assert cs.name_quota == -1
    assert cs.space_quota == -1


def test_content_summary_missing_fields_are_zero():
    cs = ContentSummary.from_response("/x", None)
    assert cs == ContentSummary(name="/x")
    assert cs.size == cs.file_count == cs.space_quota == 0


def test_server_defaults_fields():
    sd = ServerDefaults.from_response(
        {
            "blockSize": 134217728,
            "bytesPerChecksum": 512,
            "writePacketSize": 65536,
            "replication": 3,
            "fileBufferSize": 4096,
            "encryptDataTransfer": True,
            "trashInterval": 60,
            "keyProviderUri": "kms://http@localhost:9600/kms",
            "policyId": 7,
        }
    )
    assert sd.block_size == 134217728
    assert sd.bytes_per_checksum == 512
    assert sd.write_packet_size == 65536
    assert sd.replication == 3
    assert sd.file_buffer_size == 4096
    assert sd.encrypt_data_transfer is True
    assert sd.trash_interval == 60
    assert sd.key_provider_uri == "kms://http@localhost:9600/kms"
    assert sd.policy_id == 7


def test_server_defaults_optional_fields_default():
    sd = ServerDefaults.from_response({"blockSize": 1048576})
    assert sd.block_size == 1048576
    assert sd.encrypt_data_transfer is False
    assert sd.key_provider_uri == ""
    assert sd == ServerDefaults(block_size=1048576)